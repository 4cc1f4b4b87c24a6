import logging
import re

import requests

from windows_images.models.errors import ChecksumUnavailable

logger = logging.getLogger(__name__)

JENKINS_WAR_SHA_URL = (
    "https://repo.jenkins-ci.org/releases/org/jenkins-ci/main/jenkins-war/"
    "{version}/jenkins-war-{version}.war.sha256"
)
SHA256_RE = re.compile(r"^[0-9A-F]{64}$")


class ChecksumClient:
    def __init__(self, url_template: str = JENKINS_WAR_SHA_URL, timeout: int = 10):
        self.url_template: str = url_template
        self.timeout: int = timeout

    def url_for(self, version: str) -> str:
        return self.url_template.format(version=version)

    def fetch(self, version: str) -> str:
        url = self.url_for(version)
        try:
            response = requests.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise ChecksumUnavailable(f"Failed to fetch checksum from {url}: {e}") from e

        if response.status_code != 200:
            raise ChecksumUnavailable(
                f"Failed to fetch checksum from {url} (status code {response.status_code})"
            )

        # the file may carry the WAR file name after the digest
        tokens = response.text.split()
        digest = tokens[0].upper() if tokens else ""
        if not SHA256_RE.match(digest):
            raise ChecksumUnavailable(f"Unexpected checksum content for Jenkins {version}: {response.text!r}")
        logger.info(f"Resolved Jenkins {version} WAR checksum {digest}")
        return digest
