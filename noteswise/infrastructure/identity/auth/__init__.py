from .supabase_token_verifier import SupabaseTokenVerifier

__all__ = ["SupabaseTokenVerifier"]
