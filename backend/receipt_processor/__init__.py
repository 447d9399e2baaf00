"""Top-level package for the receipt processor API.

The service accepts shopping receipts, assigns each an opaque id and
reports the points a receipt earns under a fixed set of rules. It
contains the Pydantic schemas, the points rule engine with its exact
decimal helpers, the in-memory receipt store and the API routers.

To run the API locally you can execute:

```bash
uvicorn receipt_processor.api.main:app --reload --port 8080
```

Nothing is persisted: stored receipts disappear when the process exits.
Configuration values can be overridden with environment variables or a
``.env`` file at the project root.
"""

__all__: list[str] = []
