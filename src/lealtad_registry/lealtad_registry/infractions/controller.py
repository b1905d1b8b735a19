from __future__ import annotations

import logging

from flask import Flask, flash, jsonify, redirect, render_template, request, url_for

from ..common.datetime_utils import format_display, to_iso, today_local
from ..common.forms import form_date, form_flag, form_int
from ..container import Container
from ..core.constants import DEPARTAMENTOS, INSPECTORES
from ..core.exceptions import StoreError, ValidationError
from .service import NewInfraction

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.infraction_service

    def _render_form(selected_laws):
        try:
            act_date = form_date(request.form.get("fechaActa")) or today_local()
        except ValidationError:
            act_date = today_local()
        deadline = service.preview_deadline(act_date, selected_laws)

        try:
            next_id = service.next_id()
            companies = list(container.company_service.list_names())
        except StoreError as e:
            logger.warning("Infraction form data unavailable: %s", e)
            flash("No se pudieron cargar los datos del servidor", "warning")
            next_id, companies = None, []

        return render_template(
            "infractions.html",
            form=request.form,
            act_date=act_date,
            selected_laws=selected_laws,
            laws=container.law_service.list_all(),
            deadline=deadline,
            next_id=next_id,
            companies=companies,
            departamentos=DEPARTAMENTOS,
            inspectores=INSPECTORES,
            active_page="infractions",
        )

    @app.route("/actas", methods=["GET", "POST"], endpoint="infractions")
    def infractions():
        if request.method == "POST":
            try:
                rebuttal_filed = form_flag(request.form.get("presentoDescargo"))
                data = NewInfraction(
                    digital_number=request.form.get("numeroDigital", ""),
                    legal_name=request.form.get("razonSocial", ""),
                    tax_id=request.form.get("cuil", ""),
                    act_number=request.form.get("ref", ""),
                    act_date=form_date(request.form.get("fechaActa"), "Fecha de acta"),
                    inspector1=request.form.get("inspector1") or INSPECTORES[0],
                    inspector2=request.form.get("inspector2", ""),
                    locality=request.form.get("localidad") or DEPARTAMENTOS[0],
                    trade_name=request.form.get("fantasia", ""),
                    laws=tuple(request.form.getlist("leyes")),
                    expired_count=form_int(request.form.get("vencido"), "Productos vencidos"),
                    seized_count=form_int(request.form.get("decomiso"), "Decomiso"),
                    rebuttal_filed=rebuttal_filed,
                    rebuttal_date=form_date(request.form.get("fechaDescargo"), "Fecha de descargo"),
                )
                saved = service.create(data)
                container.dashboard.invalidate()
                flash(f"Acta guardada correctamente (vence {format_display(saved.rebuttal_deadline)}).", "success")
                return redirect(url_for("infractions"))
            except ValidationError as e:
                flash(str(e), "danger")
            except StoreError as e:
                flash(f"Error al guardar: {e}", "danger")
            except Exception:
                logger.exception("Unexpected error saving infraction")
                flash("Error del sistema al guardar el acta", "danger")

        return _render_form(request.form.getlist("leyes"))

    @app.route("/actas/leyes", methods=["POST"], endpoint="add_custom_law")
    def add_custom_law():
        # Posted together with the act being filled in, which is rendered back.
        selected_laws = request.form.getlist("leyes")
        try:
            label = container.law_service.add_custom(request.form.get("ley", ""))
            if label not in selected_laws:
                selected_laws.append(label)
            flash(f"Ley agregada: {label}", "success")
        except ValidationError as e:
            flash(str(e), "danger")
        except StoreError as e:
            flash(f"Error al guardar la ley: {e}", "danger")
        return _render_form(selected_laws)

    @app.route("/api/actas/plazo", endpoint="api_deadline")
    def api_deadline():
        try:
            act_date = form_date(request.args.get("fecha"), "Fecha de acta")
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        deadline = service.preview_deadline(act_date, request.args.getlist("leyes"))
        return jsonify(
            {
                "success": True,
                "dias": deadline.business_days,
                "fechaLimite": to_iso(deadline.due_date),
            }
        )
