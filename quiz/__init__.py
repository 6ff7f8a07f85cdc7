"""Query library: pure queries in quiz.core, file and environment I/O in quiz.shell."""
