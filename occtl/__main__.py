from occtl.cli import app

app(prog_name="occtl")
