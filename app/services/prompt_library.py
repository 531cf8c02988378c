# /app/services/prompt_library.py

"""
This file is the central, version-controlled library for all master prompts
used by the application's AI services. Treating prompts as code and
centralizing them here is a core architectural principle.

Literal braces in the JSON examples are doubled because every prompt is
rendered with `str.format`.
"""

GRADE_PREDICTION_PROMPT = """
Act as an academic performance analyzer. Based on the following student marks, predict their final grade (A, B, C, D, or F), a confidence score (0-100), a weighted average score (0-100), and provide 3 specific, actionable suggestions for improvement.

**--- INPUT DATA ---**
- Attendance: {attendance}%
- Assignment Score: {assignment_score}%
- Internal Marks: {internal_marks}%
- Project Marks: {project_marks}%
- Final Exam Marks: {final_exam_marks}%

**--- RULES ---**

1.  **GRADE:** `predictedGrade` MUST be exactly one of "A", "B", "C", "D", "F".
2.  **NUMBERS:** `confidence` and `predictedValue` MUST be numbers between 0 and 100.
3.  **SUGGESTIONS:** `suggestions` MUST be an array of exactly 3 short strings.
4.  **CRITICAL FORMATTING:** Your entire response must be ONLY the JSON object. Do not include any introductory text or wrap the JSON in markdown backticks like ```json ... ```.

**--- REQUIRED OUTPUT STRUCTURE ---**
{{
  "predictedGrade": "Grade",
  "confidence": Number,
  "predictedValue": Number,
  "suggestions": ["Suggestion 1", "Suggestion 2", "Suggestion 3"]
}}
"""


STUDY_PLAN_PROMPT = """
Create a study plan for a student who is weak in the following subjects: {weak_subjects}.
Generate {goal_count} specific, actionable study goals.

**--- RULES ---**

1.  **SUBJECTS:** Every goal MUST target one of the subjects listed above.
2.  **DEADLINES:** Today is {today}. Deadlines MUST be ISO dates (YYYY-MM-DD) starting from {start_date} and spread over the next 2 weeks, ending no later than {end_date}.
3.  **PRIORITY:** `priority` MUST be either "high" or "medium".
4.  **CRITICAL FORMATTING:** Output strictly a JSON array of objects. Do not include any markdown formatting or explanation. Just the JSON array.

**--- REQUIRED OUTPUT STRUCTURE ---**
[
  {{
    "subject": "Subject Name",
    "topic": "Specific Topic to Study",
    "deadline": "YYYY-MM-DD",
    "priority": "high"
  }}
]
"""
