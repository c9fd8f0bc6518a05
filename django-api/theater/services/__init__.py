from theater.services.statement_service import StatementService, generate_statement

__all__ = ["StatementService", "generate_statement"]
