"""Infrastructure layer: in-memory road network, matrices, snapshot files.

This layer depends on stdlib, the domain layer, and third-party libs (NetworkX).
It must never import from services, commands, or output.
The service layer turns its typed errors into ServiceResult payloads.
"""
