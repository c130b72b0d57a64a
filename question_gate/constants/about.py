"""Static metadata describing QuestionGate."""

APP_NAME = "QuestionGate"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "QuestionGate keeps classroom Q&A flowing by pacing how often each student can ask. "
    "Students submit questions from the web page; the teacher watches activity and lifts "
    "cooldowns from this dashboard."
)
