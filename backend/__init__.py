# backend -- FastAPI server for the Investify onboarding app
#
# Modules:
#   app        -- FastAPI application with lifespan management
#   config     -- settings from environment / .env
#   database   -- PostgreSQL / SQLite async engine
#   models     -- SQLAlchemy ORM models (users, companies, documents, notifications, messages)
#   schemas    -- Pydantic request/response schemas + response envelope
#   errors     -- AppError and exception handlers
#   deps       -- per-request identity resolution
#   services   -- company lookup, notifications, score snapshots
#   storage    -- uploaded file persistence
#   routes/    -- API endpoints (auth, company, kyc, financials, files, score, notifications, messages)
