from execbridge.cli.main import app

app(prog_name="execbridge")
