"""taskshell - A minimal shell abstraction for build-automation scripts."""

from .command import Subprocess as Subprocess
from .config import ShellConfig as ShellConfig
from .context import Context as Context
from .errors import ShellCommandError as ShellCommandError
from .errors import ShellError as ShellError
from .errors import ShellIOError as ShellIOError
from .flags import CreateFlags as CreateFlags
from .flags import RemoveFlags as RemoveFlags
