"""Simplified TCP connection lifecycle simulator built on fsmengine."""
