from pyoscmd.commands.cargo import build, doc, fmt
from pyoscmd.commands.options import config_load
from pyoscmd.commands.run_cmd import capture, run
from pyoscmd.commands.script import script

__all__ = [
    "build",
    "capture",
    "config_load",
    "doc",
    "fmt",
    "run",
    "script",
]
