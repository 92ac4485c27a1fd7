from __future__ import annotations

import logging

import requests


class GraphQLError(Exception):
    """Raised when a GraphQL response carries errors or no data."""


class BaseScraper:
    PLATFORM_NAME: str = ""
    BASE_URL: str = ""
    GRAPHQL_URL: str = ""

    def __init__(self, graphql_url: str = None, timeout: float = None):
        self.graphql_url = graphql_url or self.GRAPHQL_URL
        self.timeout = timeout
        self.logger = logging.getLogger(f'scraper.{self.PLATFORM_NAME}')
        self.session = self._create_session()

    def _create_session(self) -> requests.Session:
        session = requests.Session()
        session.headers.update({
            'User-Agent': 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36',
            'Content-Type': 'application/json',
        })
        if self.BASE_URL:
            session.headers['Referer'] = self.BASE_URL
        return session

    def _graphql(self, query: str, variables: dict) -> dict:
        """POST a GraphQL query and return its ``data`` object.

        HTTP errors, undecodable bodies and GraphQL-level errors all raise;
        callers decide whether to swallow them.
        """
        resp = self.session.post(
            self.graphql_url,
            json={'query': query, 'variables': variables},
            timeout=self.timeout,
        )
        resp.raise_for_status()
        payload = resp.json()
        data = payload.get('data')
        if data is None:
            raise GraphQLError(payload.get('errors') or 'response has no data')
        return data
