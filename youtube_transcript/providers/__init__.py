from youtube_transcript.providers.html_scrape import HtmlScrapingStrategy
from youtube_transcript.providers.innertube import InnerTubeStrategy

__all__ = ["HtmlScrapingStrategy", "InnerTubeStrategy"]
