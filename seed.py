# seed.py (in the project root)
import sys

from roster.seeder import run_seeder

if __name__ == "__main__":
    try:
        run_seeder()
    except KeyboardInterrupt:
        print("\n❌ Seeding cancelled by user")
    except Exception as e:
        print(f"❌ Seeding failed: {e}")
        sys.exit(1)
