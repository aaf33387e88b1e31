# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import codecs
import io
import json
import locale
import os
import sys

if os.name == 'nt':
    EXPLICIT_MISSING_FILE = 'nul'
else:
    EXPLICIT_MISSING_FILE = '/dev/null'


def new_style(version=8):
    "Return a minimal empty style document."
    return {"version": version, "sources": {}, "layers": []}


def read_style(f, on_null, on_empty=None):
    """Read and return style json from filename

    Parameters:
        f:  The filename to read from or null filename
            ("/dev/null" on *nix, "nul" on Windows).
            Alternatively a file-like object can be passed.
        on_null: What to return when filename null
            "empty": return empty dict
            "minimal": return minimal style without sources or layers
        on_empty: What to return when the file is completely empty (0 size)
            None: Raise an error
            "empty": return empty dict
            "minimal: return minimal style
    """
    if f == EXPLICIT_MISSING_FILE:
        if on_null == 'empty':
            return {}
        elif on_null == 'minimal':
            return new_style()
        else:
            raise ValueError(
                'Not valid value for `on_null`: %r. Valid values '
                'are "empty" or "minimal"' % (on_null,))

    if isinstance(f, str):
        with io.open(f, encoding='utf-8') as fo:
            text = fo.read()
    else:
        text = f.read()
        if isinstance(text, bytes):
            text = text.decode('utf-8')

    if not text.strip() and on_empty is not None:
        if on_empty == 'empty':
            return {}
        elif on_empty == 'minimal':
            return new_style()
        else:
            raise ValueError(
                'Not valid value for `on_empty`: %r. Valid values '
                'are None, "empty" or "minimal"' % (on_empty,))
    return json.loads(text)


def write_json(obj, filename):
    "Write obj as indented json to filename."
    with io.open(filename, "w", encoding="utf8") as f:
        json.dump(obj, f, indent=2, separators=(",", ": "))
        f.write("\n")


def _setup_std_stream_encoding():
    """Setup encoding on stdout/err

    Ensures sys.stdout/err have error-escaping encoders,
    rather than raising errors.
    """
    if os.getenv('PYTHONIOENCODING'):
        # setting PYTHONIOENCODING overrides anything we would do here
        return
    _default_encoding = locale.getpreferredencoding() or 'UTF-8'
    for name in ('stdout', 'stderr'):
        stream = getattr(sys, name)
        raw_stream = getattr(sys, '__%s__' % name)
        if stream is not raw_stream:
            # don't wrap captured or redirected output
            continue
        enc = getattr(stream, 'encoding', None) or _default_encoding
        errors = getattr(stream, 'errors', None) or 'strict'
        if errors == 'strict' or errors.startswith('surrogate'):
            bin_stream = stream.buffer
            new_stream = codecs.getwriter(enc)(bin_stream, errors='backslashreplace')
            setattr(sys, name, new_stream)


def setup_std_streams():
    """Setup sys.stdout/err

    - Ensures sys.stdout/err have error-escaping encoders,
      rather than raising errors.
    - enables colorama for ANSI escapes on Windows
    """
    _setup_std_stream_encoding()
    # must enable colorama after setting up encoding,
    # or encoding will undo colorama setup
    if sys.platform.startswith('win'):
        import colorama
        colorama.init()
