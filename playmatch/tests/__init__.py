"""
Tests Package

Test suite for the match-proposal service.

Modules:
- test_availability: Interval set operations
- test_compatibility: Pairwise compatibility scoring
- test_proposals: Proposal generation and reasons
- test_api: FastAPI endpoints

Run all tests:
    pytest playmatch/tests/
"""
