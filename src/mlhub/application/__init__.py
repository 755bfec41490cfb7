"""Application layer - commands, DTOs and use-case services."""
