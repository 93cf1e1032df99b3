import pytest


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def kurume_payload():
    return {
        "publicTime": "2024-06-01T11:00:00+09:00",
        "publicTimeFormatted": "2024/06/01 11:00:00",
        "title": "福岡県 久留米 の天気",
        "link": "https://www.jma.go.jp/bosai/forecast/#area_type=offices&area_code=400000",
        "description": {
            "publicTime": "2024-06-01T10:39:00+09:00",
            "publicTimeFormatted": "2024/06/01 10:39:00",
            "headlineText": "",
            "bodyText": "九州北部地方は高気圧に覆われています。",
            "text": "九州北部地方は高気圧に覆われています。",
        },
        "forecasts": [
            {
                "date": "2024-06-01",
                "dateLabel": "今日",
                "telop": "晴れ",
                "detail": {
                    "weather": "晴れ",
                    "wind": "北の風",
                    "wave": "０．５メートル",
                },
                "temperature": {
                    "min": {"celsius": None, "fahrenheit": None},
                    "max": {"celsius": "28", "fahrenheit": "82.4"},
                },
                "chanceOfRain": {"T00_06": "--%", "T06_12": "0%"},
            },
            {
                "date": "2024-06-02",
                "dateLabel": "明日",
                "telop": "曇り",
                "detail": {"weather": "くもり", "wind": "南の風", "wave": None},
                "temperature": {
                    "min": {"celsius": "18", "fahrenheit": "64.4"},
                    "max": {"celsius": "26", "fahrenheit": "78.8"},
                },
            },
        ],
        "location": {"area": "九州", "prefecture": "福岡県", "city": "久留米"},
    }
