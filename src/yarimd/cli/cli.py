"""CLI entrypoint: Typer app definition and command registration"""

import typer

from yarimd.cli.commands import check_cmd, diff_cmd, fix_cmd, resolve_cmd


app = typer.Typer(name="yarimd", no_args_is_help=True, help="Rewrite MDN templating macros into plain Markdown")

app.command(name="fix")(fix_cmd)
app.command(name="check")(check_cmd)
app.command(name="diff")(diff_cmd)
app.command(name="resolve")(resolve_cmd)
