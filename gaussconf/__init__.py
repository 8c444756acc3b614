"""Two-sided confidence scores for observations of a fixed normal distribution.

Run as a module to score one value read from stdin: `echo 0.05 | python -m gaussconf`.
"""
