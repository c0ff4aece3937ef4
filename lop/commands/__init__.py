from .shorten import cmd_shorten
from .paste import cmd_paste
from .upload import cmd_upload

__all__ = ['cmd_shorten', 'cmd_paste', 'cmd_upload']
