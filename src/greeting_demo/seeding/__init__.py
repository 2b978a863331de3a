"""
greeting_demo.seeding

Startup data seeding.
"""

from greeting_demo.seeding.seeder import SEED_TEXTS, GreetingSeeder

__all__ = ["SEED_TEXTS", "GreetingSeeder"]
