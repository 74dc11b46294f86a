"""
localize: hand server-side data to browser-side scripts.

Converts nested Python data into a JavaScript assignment block such as::

    _globalVars = {
    "motd": [
    "Hello world",
    ],

    };

The block is meant to be dropped verbatim into a <script> element.

ARCHITECTURAL NOTE:
-------------------
The output is NOT JSON. Every composite emits its own trailing comma,
and map entries are wrapped according to the kind of value they hold.
Consumers rely on this exact shape.
"""

__version__ = "0.1.0"
