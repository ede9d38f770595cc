# server.py
import logging
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wellcheck.assessment.config import (CONSULT_MESSAGE, CORS_ORIGINS, DISCLAIMER,
                                         LOG_LEVEL, RISK_LABELS)
from wellcheck.assessment.engine import assess
from wellcheck.assessment.features import InvalidRecordError
from wellcheck.assessment.models import LifestyleRecord

logger = logging.getLogger(__name__)

# --- Initialize app ---
app = FastAPI(title="Wellcheck Risk Assessment API")

# --- Enable CORS for the intake frontend ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InvalidRecordError)
def invalid_record(request, exc: InvalidRecordError):
    logger.warning("Rejected record: %s", exc)
    return JSONResponse(status_code=400, content={"error": str(exc)})


# --- Endpoints ---
@app.post("/assess")
def assess_record(data: LifestyleRecord):
    """
    Score a lifestyle record and return the assessment with display text
    """
    result = assess(data)
    return {
        "result": result.model_dump(by_alias=True),
        "riskLabel": RISK_LABELS[result.risk_level],
        "consultMessage": CONSULT_MESSAGE if result.should_consult_professional else None,
        "disclaimer": DISCLAIMER,
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
    }

# --- Health check endpoint ---
@app.get("/health")
def health_check():
    return {"status": "OK", "message": "Wellcheck API is running"}


if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=LOG_LEVEL)
    uvicorn.run(app, host="0.0.0.0", port=8000)
