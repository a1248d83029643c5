"""
Reset the trainer (settings and progress).

DANGEROUS: This deletes all progress!
The app shows the setup form again on the next start.

Usage:
    python -m scripts.reset_progress
"""

from core.progress import CONFIG_KEY, PROGRESS_KEY, ProgressStore, get_database_url


def main():
    print("=" * 60)
    print("WARNING: Reset Trainer")
    print("=" * 60)
    print()
    print(f"Database: {get_database_url()}")
    print("This will DELETE:")
    print("  - Trainer settings (initial count, speed, increment)")
    print("  - Progress (studied words, groups, current chunk)")
    print()

    response = input("Are you sure you want to reset? (type 'yes' to confirm): ")

    if response.lower() == "yes":
        store = ProgressStore()
        store.delete(PROGRESS_KEY)
        store.delete(CONFIG_KEY)
        store.dispose()
        print("✓ Trainer reset complete!")
    else:
        print("\nCancelled. No changes made.")


if __name__ == "__main__":
    main()
