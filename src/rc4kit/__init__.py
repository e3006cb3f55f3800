from .version import __version__ as __version__

__title__ = "rc4kit"
__description__ = "RC4 stream cipher with hex codec helpers and host bindings."
__url__ = "https://github.com/rc4kit/rc4kit"
__author__ = "rc4kit contributors"
__license__ = "Apache-2.0"
