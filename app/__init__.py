"""Federation and notification core of the Constellate events platform.

The package is a regular package so that ``app`` always resolves to this
project rather than to an unrelated namespace package on ``sys.path``.
"""
