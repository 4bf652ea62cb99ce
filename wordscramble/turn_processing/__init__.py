"""Submission processing helpers.

Every candidate word flows through the same ordered check pipeline, so the
reason a player sees for a rejected word never depends on the caller.
"""
