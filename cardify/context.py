"""
Name: Run Context (ContextVars)

Responsibilities:
  - Store invocation-scoped data (run_id, document_path)
  - Enable structured logging with per-run correlation

Collaborators:
  - application.use_cases.export_cards: sets context at run start
  - logger.py: reads context for log enrichment

Constraints:
  - Only primitive types (str) for safety
  - Default empty string (never None) for JSON serialization

Notes:
  - contextvars are not inherited by ThreadPoolExecutor workers; the export
    use case submits each artifact task through contextvars.copy_context()
"""

from contextvars import ContextVar

# R: Identifier of one export invocation (UUID) - set by the export use case
run_id_var: ContextVar[str] = ContextVar("run_id", default="")

# R: Vault-relative path of the document being exported
document_path_var: ContextVar[str] = ContextVar("document_path", default="")


def get_context_dict() -> dict:
    """
    R: Get current context as dict for log enrichment.

    Returns:
        Dict with non-empty context values only
    """
    ctx = {}

    if val := run_id_var.get():
        ctx["run_id"] = val
    if val := document_path_var.get():
        ctx["document_path"] = val

    return ctx
