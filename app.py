"""WSGI entry point: ``flask --app app run`` or ``python app.py``."""

from src.employee_management.employee_management.main import create_app

app = create_app()


if __name__ == "__main__":
    app.run(debug=app.config["DEBUG"])
