"""
labelpp — label preprocessor for LDF/TSEL/SEL instruction listings.

Lines declare labels with an inline `; @name` marker. References in
`LDF @a`, `TSEL @a @b` and `SEL @a @b` are rewritten to the 0-based
index of the declaring line, counting non-blank lines only.

PIPELINE:
---------
    raw text -> parser (canonical lines, label table, instructions)
             -> resolver (substitution, whole-or-nothing)
             -> backends (text, DOT)
"""

__version__ = "0.1.0"
