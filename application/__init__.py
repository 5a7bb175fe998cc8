"""
Application layer for the workout engine service.

This package contains:
- ports/: Repository interfaces for the read-only collaborators
- use_cases/: Entry points that fetch data, run the engine and translate
  collaborator failures
- exceptions: Errors shared across layers
"""
