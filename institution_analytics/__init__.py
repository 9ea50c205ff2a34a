"""
Institution Analytics Application Package.

Modules:
- config: Environment variables and settings
- dependencies: Shared dependencies (Supabase, Gemini, request parsing)
- errors: Service error codes and the error envelope
- prompts: Centralized LLM prompts
- models: Pydantic record, request/response and result schemas
- services: Business logic (aggregation engine, record intake, tracking, export, summary)
- routers: API endpoints
"""
