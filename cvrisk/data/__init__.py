"""Read-only reference tables and coefficients, one module per score family.

Values are transcribed from the publications cited in each module and are
never modified at runtime.
"""
