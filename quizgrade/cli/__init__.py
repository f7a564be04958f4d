"""Command line interface for quizgrade."""
