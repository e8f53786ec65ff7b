# Core type aliases for prefn's data model.
# Values are plain Python ints, function bodies are the raw source text
# captured between '[' and ']'. No wrapper types are defined.
#
# Naming guidance:
# - Value: an evaluated result, or the argument threaded through a body.
# - Body:  the verbatim text of one function definition.

Value = int
Body = str
