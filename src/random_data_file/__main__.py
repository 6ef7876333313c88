from . import app

app(prog_name="random-data-file")
