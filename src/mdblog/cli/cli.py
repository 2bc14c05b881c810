"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdblog.cli.commands import check_cmd, export_cmd, list_cmd, main_callback, show_cmd, tags_cmd


app = typer.Typer(name="mdblog", no_args_is_help=True, help="Blog content index")

app.callback()(main_callback)
app.command(name="list")(list_cmd)
app.command(name="show")(show_cmd)
app.command(name="check")(check_cmd)
app.command(name="tags")(tags_cmd)
app.command(name="export")(export_cmd)
