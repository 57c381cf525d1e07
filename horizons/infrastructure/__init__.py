"""Infrastructure layer: adapters for Redis, Supabase, mail and logging."""
