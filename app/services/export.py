"""CSV export of assessments: one row per assessment, one column per question value."""
import csv
import io
import json
from typing import Sequence

from app.models.assessment import Assessment

DATE_FORMAT = "%d/%m/%Y, %H:%M:%S"


def assessments_to_csv(assessments: Sequence[Assessment], question_count: int, user_name: str = "") -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(
        ["Assessment ID", "User Name", "User ID", "Score", "Stress Level"]
        + [f"Q{i}" for i in range(1, question_count + 1)]
        + ["Recommendations", "Date"]
    )
    for a in assessments:
        values = {ans["question_index"]: ans["value"] for ans in json.loads(a.answers_json)}
        recommendations = json.loads(a.recommendations_json or "[]")
        writer.writerow(
            [a.id, user_name, a.user_id, a.total, a.level]
            + [values.get(i, "") for i in range(question_count)]
            + [" | ".join(recommendations), a.created_at.strftime(DATE_FORMAT) if a.created_at else ""]
        )
    return buf.getvalue()
