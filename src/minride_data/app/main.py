# minride_data/app/main.py
from minride_data.app.build import build
from minride_data.errors import MinRideDataError


def main() -> int:
    """Generate the default dataset. Exit code 0 on success, 1 if it could not be written."""
    app = build()
    try:
        app.run()
    except MinRideDataError:
        # already reported through the run hooks
        return 1
    return 0
