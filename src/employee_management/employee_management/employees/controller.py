from __future__ import annotations

from flask import Flask, abort, flash, redirect, render_template, request, url_for

from ..container import Container
from ..core.constants import MAX_EMPLOYEE_ID
from ..core.exceptions import ValidationError
from .forms import bind_employee
from .model import Employee


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    def _get_or_404(employee_id: int) -> Employee:
        employee = service.get_employee_by_id(employee_id)
        if employee is None:
            abort(404, description=f"Employee {employee_id} not found")
        return employee

    @app.route("/", endpoint="index")
    def index():
        return redirect(url_for("list_employees"))

    @app.route("/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        return render_template("employee-list.html", employees=service.get_all_employees())

    @app.route("/employees/new", endpoint="new_employee")
    def new_employee():
        return render_template("employee-form.html", employee=Employee())

    @app.route("/employees", methods=["POST"], endpoint="save_employee")
    def save_employee():
        try:
            employee = bind_employee(request.form)
        except ValidationError as e:
            flash(str(e), "danger")
            # Re-render with what was submitted so nothing typed is lost.
            return render_template("employee-form.html", employee=request.form), 400

        saved = service.save_employee(employee)
        flash(f"Saved employee {saved.name or saved.id}.", "success")
        return redirect(url_for("list_employees"))

    @app.route(f"/employees/edit/<int(max={MAX_EMPLOYEE_ID}):employee_id>", endpoint="edit_employee")
    def edit_employee(employee_id: int):
        return render_template("employee-form.html", employee=_get_or_404(employee_id))

    @app.route(f"/employees/delete/<int(max={MAX_EMPLOYEE_ID}):employee_id>", methods=["GET", "POST"], endpoint="delete_employee")
    def delete_employee(employee_id: int):
        service.delete_employee(employee_id)
        flash("Employee deleted.", "success")
        return redirect(url_for("list_employees"))

    @app.route(f"/employees/view/<int(max={MAX_EMPLOYEE_ID}):employee_id>", endpoint="view_employee")
    def view_employee(employee_id: int):
        return render_template("employee-view.html", employee=_get_or_404(employee_id))
