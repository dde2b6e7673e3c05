"""
Tests Package.

Unit tests for the neuron, axon and world simulation step, plus headless
rendering and frame scheduling checks.
"""
