"""Application layer: request DTOs and orchestration services."""
