from flask import Blueprint, Response
from utils.admin_service import get_dashboard_stats, get_all_student_results
from utils.export_service import export_to_csv, export_to_json
from utils.helpers import success_response, respond
from utils.utils import staff_required

admin_bp = Blueprint('admin', __name__)


def download(result):
    if not result.success:
        return respond(result)

    export = result.data
    return Response(
        export["content"],
        mimetype=export["contentType"],
        headers={"Content-Disposition": f'attachment; filename="{export["filename"]}"'},
    )

# Dashboard statistics
@admin_bp.route('/stats', methods=['GET'])
@staff_required
def get_stats():
    return success_response({"stats": get_dashboard_stats()})

# Pre/post results for every student
@admin_bp.route('/results', methods=['GET'])
@staff_required
def get_results():
    return success_response({"results": get_all_student_results()})


@admin_bp.route('/export/csv', methods=['GET'])
@staff_required
def export_csv():
    return download(export_to_csv())


@admin_bp.route('/export/json', methods=['GET'])
@staff_required
def export_json():
    return download(export_to_json())
