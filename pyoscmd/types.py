from typing import Literal

StdioMode = Literal["inherit", "piped", "null"]
InspectMode = Literal["stderr", "log", "none"]
Stream = Literal["stdout", "stderr", "both"]
Action = Literal["run", "capture", "script", "fmt", "doc", "build"]


Argv = tuple[str, ...]
