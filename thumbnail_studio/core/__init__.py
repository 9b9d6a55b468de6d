"""Core domain logic: exception hierarchy and provider response interpretation."""
