"""HTTP layer exposing the record repositories."""
