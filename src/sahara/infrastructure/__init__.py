"""
SAHARA Infrastructure Layer

Cross-cutting adapters (metrics) kept apart from the domain services.
"""
