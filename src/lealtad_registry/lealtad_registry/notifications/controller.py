from __future__ import annotations

import logging

from flask import Flask, flash, jsonify, redirect, render_template, request, url_for

from ..common.datetime_utils import today_local
from ..common.forms import form_date, form_int
from ..container import Container
from ..core.constants import DEPARTAMENTOS, INSPECTORES
from ..core.enums import Area, NotifType
from ..core.exceptions import StoreError, ValidationError
from .service import NewNotification

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _companies() -> list:
        try:
            return list(container.company_service.list_names())
        except StoreError as e:
            logger.warning("Company list unavailable: %s", e)
            return []

    @app.route("/", methods=["GET", "POST"], endpoint="notifications")
    def notifications():
        if request.method == "POST":
            try:
                data = NewNotification(
                    ref=request.form.get("ref", ""),
                    against=request.form.get("contra", ""),
                    addressed_to=request.form.get("dirigidoA", ""),
                    year=form_int(request.form.get("anio"), "Año", default=today_local().year),
                    area=request.form.get("area") or Area.CONSUMIDOR.value,
                    department=request.form.get("departamento") or DEPARTAMENTOS[0],
                    type=request.form.get("tipo") or NotifType.AUDIENCIA.value,
                    hearing_date=form_date(request.form.get("fechaAudiencia"), "Fecha de audiencia"),
                    notifier=request.form.get("notificador") or INSPECTORES[0],
                )
                container.notification_service.create(data)
                container.dashboard.invalidate()
                flash("Notificación guardada correctamente.", "success")
                return redirect(url_for("notifications"))
            except ValidationError as e:
                flash(str(e), "danger")
            except StoreError as e:
                flash(f"Error al guardar: {e}", "danger")
            except Exception:
                logger.exception("Unexpected error saving notification")
                flash("Error del sistema al guardar la notificación", "danger")

        return render_template(
            "notifications.html",
            form=request.form,
            areas=list(Area),
            types=list(NotifType),
            departamentos=DEPARTAMENTOS,
            inspectores=INSPECTORES,
            companies=_companies(),
            today=today_local(),
            active_page="notifications",
        )

    @app.route("/api/empresas", endpoint="api_companies")
    def api_companies():
        return jsonify(_companies())
