from typing import List, Optional

import httpx

from shared.schemas import FAQAnswer, FAQEntryRead, FAQQuestion, QueryLogRead, UnansweredQuestion


class FAQClient:
    """Async client for the FAQ service, used by other portal services."""

    def __init__(
        self,
        base_url: str,
        operator_token: Optional[str] = None,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._headers = {"X-Operator-Token": operator_token} if operator_token else {}
        self._client = httpx.AsyncClient(
            base_url=self._base_url, headers=self._headers, timeout=timeout, transport=transport
        )

    async def ask(self, question: str) -> str:
        payload = FAQQuestion(question=question)
        response = await self._client.post("/api/faq", json=payload.model_dump())
        response.raise_for_status()
        return FAQAnswer.model_validate(response.json()).answer

    async def list_entries(self, category: Optional[str] = None) -> List[FAQEntryRead]:
        params = {"category": category} if category else None
        response = await self._client.get("/api/faq", params=params)
        response.raise_for_status()
        return [FAQEntryRead.model_validate(item) for item in response.json()]

    async def recent_queries(self, limit: int = 50) -> List[QueryLogRead]:
        response = await self._client.get("/operators/queries", params={"limit": limit})
        response.raise_for_status()
        return [QueryLogRead.model_validate(item) for item in response.json()]

    async def unanswered(self, limit: int = 50) -> List[UnansweredQuestion]:
        response = await self._client.get("/operators/unanswered", params={"limit": limit})
        response.raise_for_status()
        return [UnansweredQuestion.model_validate(item) for item in response.json()]

    async def aclose(self):
        await self._client.aclose()
