"""Session orchestration for the TCP simulator."""
