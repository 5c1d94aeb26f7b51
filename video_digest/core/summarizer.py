"""
Module for summarizing transcripts using LLM models.
"""

import os
from typing import Optional

from langchain.chat_models import init_chat_model
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import HumanMessage

from video_digest.models.schemas import SummaryConfig
from video_digest.utils.error_handling import SummarizationFailed
from video_digest.utils.logger import logging

NO_SUMMARY = "No summary generated"


class TranscriptSummarizer:
    """Class to handle transcript summarization operations."""

    def __init__(
        self,
        config: Optional[SummaryConfig] = None,
        llm: Optional[BaseChatModel] = None,
        api_key: Optional[str] = None,
    ):
        """
        Initialize the summarizer with a chat model.

        Args:
            config: Configuration for summarization
            llm: Pre-built chat model (a Groq model is built if None)
            api_key: Groq API key (if None, will try to get from environment)
        """
        self.config = config or SummaryConfig()
        if llm is None:
            api_key = api_key or os.getenv("GROQ_API_KEY")
            if not api_key:
                raise ValueError("Groq API key is required. Set it in .env file or pass directly.")

            llm = init_chat_model(
                model=self.config.model,
                model_provider="groq",
                temperature=self.config.temperature,
                timeout=self.config.timeout,
                api_key=api_key,
            )

        self.llm = llm

    async def summarize(self, prompt: str, max_tokens: int) -> str:
        """
        Generate a summary for a prepared prompt.

        Args:
            prompt: Prompt built by ``build_summary_prompt``
            max_tokens: Generation cap passed to the model

        Returns:
            Summary text, or "No summary generated" if the model returned nothing

        Raises:
            SummarizationFailed: On upstream errors (rate limit, auth, network)
        """
        logging.info(f"Sending prompt to {self.config.model} for summarization...")
        try:
            response = await self.llm.bind(max_tokens=max_tokens).ainvoke(
                [HumanMessage(content=prompt)]
            )
        except Exception as e:
            logging.error(f"Error generating summary: {str(e)}")
            raise SummarizationFailed(self.config.model, e) from e

        content = getattr(response, "content", None)
        if isinstance(content, list):
            content = "".join(
                part if isinstance(part, str) else part.get("text", "")
                for part in content
            )

        if not content or not content.strip():
            logging.warning("Model returned no content")
            return NO_SUMMARY

        logging.info("Summarization completed.")
        return content
