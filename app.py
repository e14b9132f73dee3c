"""Entry point: `python app.py` for local runs, or `flask --app app run`."""
import os

from src.hr_timesheet.hr_timesheet.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "3000")))
