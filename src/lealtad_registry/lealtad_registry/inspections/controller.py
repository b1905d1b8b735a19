from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.datetime_utils import today_local
from ..common.forms import form_date, form_flag
from ..container import Container
from ..core.constants import DEPARTAMENTOS, INSPECTORES
from ..core.exceptions import StoreError, ValidationError
from .service import NewInspection

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.inspection_service

    @app.route("/inspecciones", methods=["GET", "POST"], endpoint="inspections")
    def inspections():
        if request.method == "POST":
            try:
                data = NewInspection(
                    legal_name=request.form.get("razonSocial", ""),
                    inspection_date=form_date(request.form.get("fecha"), "Fecha"),
                    ref=request.form.get("ref", ""),
                    inspector1=request.form.get("inspector1") or INSPECTORES[0],
                    inspector2=request.form.get("inspector2", ""),
                    locality=request.form.get("localidad") or DEPARTAMENTOS[0],
                    trade_name=request.form.get("fantasia", ""),
                    tax_id=request.form.get("cuil", ""),
                    laws=tuple(request.form.getlist("leyes")),
                    ex_officio=form_flag(request.form.get("esActuacionDeOficio")),
                )
                service.create(data)
                container.dashboard.invalidate()
                flash("Acta de inspección guardada.", "success")
                return redirect(url_for("inspections"))
            except ValidationError as e:
                flash(str(e), "danger")
            except StoreError as e:
                flash(f"Error al guardar: {e}", "danger")
            except Exception:
                logger.exception("Unexpected error saving inspection")
                flash("Error del sistema al guardar la inspección", "danger")

        try:
            next_id = service.next_id()
            companies = list(container.company_service.list_names())
        except StoreError as e:
            logger.warning("Inspection form data unavailable: %s", e)
            flash("No se pudieron cargar los datos del servidor", "warning")
            next_id, companies = None, []

        return render_template(
            "inspections.html",
            form=request.form,
            today=today_local(),
            selected_laws=request.form.getlist("leyes"),
            laws=container.law_service.list_all(),
            next_id=next_id,
            companies=companies,
            departamentos=DEPARTAMENTOS,
            inspectores=INSPECTORES,
            active_page="inspections",
        )
