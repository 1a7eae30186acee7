# config/tools/validate_profiles.py

import sys           # for exit codes
from pprint import pprint  # for structured printing

# make src discoverable if running as a script
from pathlib import Path
# __file__ is .../config/tools/validate_profiles.py
# parents[2] is the project root; append ROOT/src
PROJECT_ROOT = Path(__file__).resolve().parents[2]
sys.path.append(str(PROJECT_ROOT / "src"))

from env.loader import list_profiles, load_profile  # import our loader


def main() -> None:
    """Load and print every profile, failing fast on the first bad one."""
    try:
        names = list_profiles()
        profiles = [load_profile(name) for name in names]
    except Exception as e:                   # report any loader error and fail
        print("Profile validation FAILED:", file=sys.stderr)
        print(repr(e), file=sys.stderr)
        sys.exit(1)                          # non-zero exit: CI will mark as failed

    print("Profile validation OK.")
    for profile in profiles:
        print(f"\nProfile: {profile.name} (log level {profile.log_level})")
        print("Grid:")
        pprint(profile.grid)
        print("Benchmark:")
        pprint(profile.benchmark)


if __name__ == "__main__":
    main()  # run main() only when script is executed directly
