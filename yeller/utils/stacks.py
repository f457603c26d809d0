"""
yeller.utils.stacks
~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2014 by the Yeller Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

import collections
import os.path
import sys

from yeller.conf import defaults

StackFrame = collections.namedtuple(
    'StackFrame', ['filename', 'line_number', 'function_name'])
StackFrame.__doc__ = """
A single call site. Being a tuple it serializes as the
``[filename, line_number, function_name]`` array collectors expect.
"""


def is_library_path(filename, root=defaults.ROOT):
    if not filename:
        return False
    return os.path.abspath(filename).startswith(root + os.sep)


def get_function_name(frame):
    f_code = getattr(frame, 'f_code', None)
    name = getattr(f_code, 'co_qualname', None) or getattr(f_code, 'co_name', None)
    if not name:
        return defaults.UNKNOWN_FUNCTION

    f_globals = getattr(frame, 'f_globals', None) or {}
    try:
        module_name = f_globals.get('__name__')
    except Exception:
        module_name = None
    if module_name:
        return '%s.%s' % (module_name, name)
    return name


def get_filename(frame):
    f_code = getattr(frame, 'f_code', None)
    filename = getattr(f_code, 'co_filename', None)
    if not filename:
        return defaults.UNKNOWN_FUNCTION
    # <string>, <frozen importlib._bootstrap> and friends have no real path
    if filename.startswith('<'):
        return filename
    return os.path.abspath(filename)


def get_frame_info(frame):
    lineno = getattr(frame, 'f_lineno', None)
    return StackFrame(
        get_filename(frame),
        str(lineno if lineno is not None else 0),
        get_function_name(frame),
    )


def in_modules(frame, module_names):
    try:
        module_name = frame.f_globals.get('__name__') or ''
    except Exception:
        return False
    return any(module_name == m or module_name.startswith(m + '.')
               for m in module_names)


def iter_stack_frames(frame):
    while frame is not None:
        yield frame
        frame = getattr(frame, 'f_back', None)


def capture_stack(skip_frames=0, max_depth=defaults.MAX_STACK_DEPTH,
                  root=defaults.ROOT, frame=None, skip_modules=()):
    """
    Walks the calling thread's stack and returns a list of
    :class:`StackFrame`, innermost call first.

    ``skip_frames`` drops that many frames, starting with the caller of this
    function. At most ``max_depth`` frames are walked and frames from files
    inside ``root`` (this library) are left out. Frames that cannot be
    fully resolved are reported with placeholder values; this function
    does not raise.

    Leading frames from ``skip_modules`` (and their submodules) are dropped
    as well, so a trace captured from inside ``logging`` or ``contextlib``
    machinery starts at the application code that called into it.
    """
    if frame is None:
        try:
            frame = sys._getframe(skip_frames + 1)
        except ValueError:
            # asked to skip more frames than there are
            return []

    results = []
    for depth, f in enumerate(iter_stack_frames(frame)):
        if depth >= max_depth:
            break
        try:
            info = get_frame_info(f)
        except Exception:
            info = StackFrame(defaults.UNKNOWN_FUNCTION, '0',
                              defaults.UNKNOWN_FUNCTION)

        if is_library_path(info.filename, root):
            continue
        if not results and skip_modules and in_modules(f, skip_modules):
            continue
        results.append(info)
    return results
