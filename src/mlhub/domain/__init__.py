"""Domain layer - Core business logic and entities.

This package contains the core business logic of the project and training
service, free from any external framework dependencies. It defines:

- Value types that keep illegal strings out of the domain
- Business entities (projects, trainings, activities)
- Repository interfaces for data access
- Ports to the repository provider and the training platform
"""
