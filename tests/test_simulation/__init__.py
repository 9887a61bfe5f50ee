"""
Tests for the Simulation Module

Test modules:
    - test_models: Tests for constants, data models and configuration
    - test_generator: Tests for the attribute generator
    - test_symmetry: Tests for the symmetry game
    - test_halving: Tests for the halving game and batch runs
    - test_probability: Tests for exact odds
    - test_report: Tests for report output
"""
