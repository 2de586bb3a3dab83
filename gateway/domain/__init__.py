"""Domain layer (pure logic).

- Keep board layout rules and payload shape checks here.
- Avoid I/O: no DB sessions, no HTTP/FastAPI, no httpx.
- Functions are deterministic and raise ValueError on invalid input.
"""
