from __future__ import annotations

import dataclasses
import logging

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.datetime_utils import days_until, format_display, to_iso, today_local
from ..common.forms import form_date
from ..container import Container
from ..core.constants import INSPECTORES
from ..core.enums import NotifType
from ..core.exceptions import RecordNotFoundError, StoreError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    state = container.dashboard

    @app.route("/dashboard", endpoint="dashboard")
    def dashboard():
        try:
            state.refresh()
        except StoreError as e:
            flash(f"No se pudieron cargar los datos: {e}", "danger")

        today = today_local()
        term = request.args.get("q", "")
        edit_id = request.args.get("edit", type=int)
        return render_template(
            "dashboard.html",
            stats=state.stats(today=today) if state.loaded else None,
            rows=state.search(term) if state.loaded else [],
            term=term,
            edit_id=edit_id,
            notif_types=list(NotifType),
            inspectores=INSPECTORES,
            report_start=to_iso(today.replace(day=1)),
            report_end=to_iso(today),
            days_until=lambda d: days_until(d, today=today),
            active_page="dashboard",
        )

    @app.route("/dashboard/actualizar", methods=["POST"], endpoint="dashboard_refresh")
    def dashboard_refresh():
        try:
            state.refresh()
            flash("Datos actualizados.", "info")
        except StoreError as e:
            flash(f"No se pudieron cargar los datos: {e}", "danger")
        return redirect(url_for("dashboard"))

    @app.route("/dashboard/notificaciones/<int:record_id>/editar", methods=["POST"], endpoint="notification_edit")
    def notification_edit(record_id: int):
        try:
            current = state.get_notification(record_id)
            updated = dataclasses.replace(
                current,
                ref=request.form.get("ref", current.ref),
                addressed_to=request.form.get("dirigidoA", current.addressed_to),
                hearing_date=form_date(request.form.get("fechaAudiencia"), "Fecha de audiencia"),
                notifier=request.form.get("notificador") or current.notifier,
                notified_on=form_date(request.form.get("notificado"), "Fecha de notificación"),
            )
            state.update_notification(updated)
            flash(f"Notificación #{record_id} actualizada.", "success")
        except (ValidationError, StoreError) as e:
            flash(f"Error al guardar los cambios: {e}", "danger")
            return redirect(url_for("dashboard", edit=record_id))
        except Exception:
            logger.exception("Unexpected error updating notification %s", record_id)
            flash("Error del sistema al guardar los cambios", "danger")
            return redirect(url_for("dashboard", edit=record_id))
        return redirect(url_for("dashboard"))

    @app.route("/dashboard/notificaciones/<int:record_id>/eliminar", methods=["POST"], endpoint="notification_delete")
    def notification_delete(record_id: int):
        try:
            state.delete_notification(record_id)
            flash(f"Expediente #{record_id} eliminado.", "success")
        except RecordNotFoundError as e:
            flash(str(e), "warning")
        except (ValidationError, StoreError) as e:
            flash(f"Error al eliminar: {e}", "danger")
        except Exception:
            logger.exception("Unexpected error deleting notification %s", record_id)
            flash("Error del sistema al eliminar", "danger")
        return redirect(url_for("dashboard"))

    @app.route("/informe", endpoint="period_report")
    def period_report():
        try:
            start = form_date(request.args.get("start"), "Fecha inicio")
            end = form_date(request.args.get("end"), "Fecha fin")
            state.refresh()
            report = container.report_service.build_period_report(
                start=start,
                end=end,
                notifications=state.notifications,
                infractions=state.infractions,
                inspections=state.inspections,
            )
        except (ValidationError, StoreError) as e:
            flash(str(e), "danger")
            return redirect(url_for("dashboard"))

        return render_template("report/period_report.html", report=report)
