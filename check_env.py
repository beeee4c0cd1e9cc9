#!/usr/bin/env python3
"""Helper script to check the .env file and the schedule data sources."""

from pathlib import Path
import os

TEMPLATE = """# Supabase Configuration (optional; JSON files are used when unset)
LIBHOURS_SUPABASE_URL=
LIBHOURS_SUPABASE_KEY=

# API Configuration
LIBHOURS_API_PREFIX=/api
LIBHOURS_DEFAULT_LOCATION=GISHUSHU
# LIBHOURS_FRONTEND_ALLOWED_ORIGINS accepts a JSON array or comma-separated list

# Schedule data files
LIBHOURS_DATA_ROOT=./data
# LIBHOURS_SCHEDULES_FILE / LIBHOURS_EXCEPTIONS_FILE default to files under LIBHOURS_DATA_ROOT

# Live status
LIBHOURS_NEXT_OPEN_SCAN_DAYS=14
LIBHOURS_CLOSING_SOON_HOURS=2
"""


def _mask(value: str) -> str:
    return value[:20] + "..." + value[-10:] if len(value) > 30 else value


def main():
    project_root = Path(__file__).parent
    env_file = project_root / ".env"

    print("=" * 60)
    print("Library Hours environment checker")
    print("=" * 60)
    print()

    if not env_file.exists():
        with open(env_file, "w", encoding="utf-8") as f:
            f.write(TEMPLATE)
        print(f"✅ Created template .env file at: {env_file}")
        print("   Edit it and run this script again.")
        return

    print(f"✅ Found .env file at: {env_file}")
    key = os.getenv("LIBHOURS_SUPABASE_KEY")
    if key:
        print(f"   LIBHOURS_SUPABASE_KEY (from environment): {_mask(key)}")
    print()

    try:
        import sys
        sys.path.insert(0, str(project_root / "src"))
        from library_hours.config import settings
        from library_hours.data.schedule_repository import load_snapshot
    except Exception as e:
        print(f"❌ Error loading config: {e}")
        print("Make sure you're running this from the project root directory")
        return

    if settings.supabase_url and settings.supabase_key:
        print(f"✅ Supabase configured: {settings.supabase_url[:30]}...")
    else:
        print("ℹ️  Supabase not configured, schedule data comes from files")
        for path in (settings.schedules_file, settings.exceptions_file):
            marker = "✅" if path.exists() else "❌"
            print(f"   {marker} {path}")

    snapshot = load_snapshot()
    print()
    print(
        f"Loaded {len(snapshot.schedules)} weekly schedules and "
        f"{len(snapshot.exceptions)} closure exceptions from {snapshot.source}"
    )


if __name__ == "__main__":
    main()
