import csv
import io
import json
from datetime import datetime, timezone
from flask import current_app
from classes.results import Ok, Err
from utils.admin_service import get_all_student_results, get_export_data

CSV_HEADERS = [
    "Student Code",
    "Pre-Test Score (%)",
    "Post-Test Score (%)",
    "Score Difference",
    "Improvement (%)",
    "Pre-Test Date",
    "Post-Test Date",
]

RESULT_FIELDS = [
    "studentCode",
    "preTestScore",
    "postTestScore",
    "scoreDifference",
    "improvementPercentage",
    "preTestDate",
    "postTestDate",
]


def export_filename(extension):
    today = datetime.now(timezone.utc).date().isoformat()
    return f"{current_app.config['EXPORT_FILE_PREFIX']}-{today}.{extension}"


def export_to_csv():
    """Student results as CSV; missing values are written as N/A."""
    results = get_all_student_results()
    if not results:
        return Err("EXPORT_ERROR", "No data to export")

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for row in results:
        writer.writerow(["N/A" if row[f] is None else row[f] for f in RESULT_FIELDS])

    return Ok({
        "content": buffer.getvalue().rstrip("\n"),
        "filename": export_filename("csv"),
        "contentType": "text/csv",
    })


def export_to_json():
    export_data = get_export_data()
    if not export_data["students"]:
        return Err("EXPORT_ERROR", "No data to export")

    test_results = export_data["testResults"]
    payload = {
        "exportDate": datetime.now(timezone.utc).isoformat(),
        "summary": {
            "totalStudents": len(export_data["students"]),
            "totalTestResults": len(test_results),
            "preTestCount": sum(1 for r in test_results if r["testType"] == "pre"),
            "postTestCount": sum(1 for r in test_results if r["testType"] == "post"),
        },
        "students": export_data["students"],
        "testResults": test_results,
        "studentResults": get_all_student_results(),
    }

    return Ok({
        "content": json.dumps(payload, indent=2),
        "filename": export_filename("json"),
        "contentType": "application/json",
    })
