"""Service layer behind the fastfile facade."""
