"""Service layer. Every public service method returns a ServiceResult."""
