from docscraper.crawler.crawler import Crawler, CrawlRun
from docscraper.crawler.doc_crawler import CrawlerOptions, DocumentCrawler

__all__ = ["Crawler", "CrawlRun", "CrawlerOptions", "DocumentCrawler"]
