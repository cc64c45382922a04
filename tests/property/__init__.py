"""Property-based testing for propbag.

Hypothesis-driven tests that check PropertyBag invariants over generated
sequences of add/set operations, complementing the example-based unit tests.
"""
