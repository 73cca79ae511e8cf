# vim: set fileencoding=utf-8 :

from .. import context  # noqa: F401

from . aptlogtester import AptLogTester
from . capture import capture_stdout, capture_stderr

__all__ = ['AptLogTester', 'capture_stderr', 'capture_stdout']
