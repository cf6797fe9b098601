from .commands import termgrid

termgrid(prog_name="termgrid")
