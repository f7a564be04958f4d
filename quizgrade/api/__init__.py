"""HTTP API for quizgrade."""
