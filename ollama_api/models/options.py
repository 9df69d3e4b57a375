from pydantic import BaseModel
from typing import List, Optional, Union


class Options(BaseModel):
    """Model parameters from the Modelfile reference.

    Every field is optional; only the ones that were set are sent. Values are
    passed through untouched, the server decides what is acceptable.
    """

    # 0 = disabled, 1 = Mirostat, 2 = Mirostat 2.0
    mirostat: Optional[int] = None
    mirostat_eta: Optional[float] = None
    mirostat_tau: Optional[float] = None
    num_ctx: Optional[int] = None
    # 0 = disabled, -1 = num_ctx
    repeat_last_n: Optional[int] = None
    repeat_penalty: Optional[float] = None
    temperature: Optional[float] = None
    seed: Optional[int] = None
    stop: Optional[Union[str, List[str]]] = None
    # -1 = infinite generation
    num_predict: Optional[int] = None
    top_k: Optional[int] = None
    top_p: Optional[float] = None
    min_p: Optional[float] = None

    def is_default(self) -> bool:
        return self == Options()
