from tasktrack.main import app

app(prog_name="tasktrack")
