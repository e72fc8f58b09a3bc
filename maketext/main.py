from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from .markov import DEFAULT_WORD_BUDGET, MarkovMachine
from .sources import SourceError, read_url

app = FastAPI(title="maketext: Markov text generation")

# -----------------------
# Default corpus
# -----------------------
DEFAULT_CORPUS = """
The Count of Monte Cristo is a novel written by Alexandre Dumas.
It tells the story of Edmond Dantes, who is falsely imprisoned
and later escapes to seek revenge on the men who betrayed him.
The story of the count is a story of patience and of revenge.
"""
default_model = MarkovMachine(DEFAULT_CORPUS)

# -----------------------
# Request schemas
# -----------------------
class TextGenerationRequest(BaseModel):
    # text wins over url; neither means the default corpus
    text: Optional[str] = None
    url: Optional[str] = None

    start: Optional[str] = None
    num_words: int = Field(DEFAULT_WORD_BUDGET, gt=0)

def resolve_model(req: TextGenerationRequest):
    if req.text is not None:
        return MarkovMachine(req.text), "text"
    if req.url:
        return MarkovMachine(read_url(req.url)), "url"
    return default_model, "default"

# -----------------------
# Root & status
# -----------------------
@app.get("/")
def root():
    return {"status": "maketext API Active", "default_keys": len(default_model.chains)}

# -----------------------
# Generation
# -----------------------
@app.post("/generate")
def generate_text(req: TextGenerationRequest):
    try:
        mm, source = resolve_model(req)
    except SourceError as e:
        print(f"[Markov] {e}")
        raise HTTPException(status_code=502, detail=str(e))

    try:
        text = mm.make_text(req.num_words, start=req.start)
    except Exception as e:
        print(f"[Markov] Generation failed: {e}")
        raise HTTPException(status_code=500, detail=f"Markov generation failed: {e}")

    return {"generated_text": text, "model": "markov", "source": source}
