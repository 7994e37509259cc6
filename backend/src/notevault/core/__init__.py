"""Domain layer: models, schemas, repositories, services and the query builder."""
