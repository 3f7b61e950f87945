from __future__ import annotations

from dataclasses import replace

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import NotFoundError


def register(app: Flask, container: Container) -> None:
    svc = container.site_service

    @app.route("/api/sites", methods=["GET"], endpoint="sites_list")
    def sites_list():
        return jsonify({"success": True, "sites": [s.to_dict() for s in svc.list_sites()]})

    @app.route("/api/sites", methods=["POST"], endpoint="sites_create")
    def sites_create():
        data = request.get_json(silent=True) or {}
        site = svc.create_site(
            name=data.get("name", ""),
            client_name=data.get("client_name", ""),
            contact_number=data.get("contact_number", ""),
            location=data.get("location", ""),
        )
        return jsonify({"success": True, "site": site.to_dict()}), 201

    @app.route("/api/sites/<site_id>", methods=["PUT"], endpoint="sites_update")
    def sites_update(site_id: str):
        current = svc.get(site_id)
        if not current:
            raise NotFoundError("Site not found")
        data = request.get_json(silent=True) or {}
        fields = {k: data[k] for k in ("name", "client_name", "contact_number", "location") if k in data}
        site = svc.update_site(replace(current, **fields))
        return jsonify({"success": True, "site": site.to_dict()})

    @app.route("/api/sites/<site_id>", methods=["DELETE"], endpoint="sites_delete")
    def sites_delete(site_id: str):
        svc.delete_site(site_id)
        return jsonify({"success": True})
