"""
Repository acquisition: local checkouts, git clones and ssh agent setup
"""

import logging
import os
import subprocess
import tempfile
from pathlib import Path
from typing import List, Optional

from ..config.settings import SourceSettings
from ..utils.errors import AuditError, ErrorType

logger = logging.getLogger(__name__)

SSH_TEST_HOST = 'git@github.com'
AGENT_ENV_VARS = ('SSH_AUTH_SOCK', 'SSH_AGENT_PID')


def run_command(cmd: List[str], cwd: Optional[str] = None) -> subprocess.CompletedProcess:
    """Run an external command, raising AuditError if it cannot start or fails"""
    try:
        result = subprocess.run(cmd, cwd=cwd, capture_output=True, text=True)
    except OSError as e:
        raise AuditError(f"Failed to run {cmd[0]}", error_type=ErrorType.ACQUISITION, cause=e)

    if result.returncode != 0:
        stderr = (result.stderr or '').strip()
        raise AuditError(
            f"{' '.join(cmd[:2])} exited with status {result.returncode}: {stderr}",
            error_type=ErrorType.ACQUISITION,
        )
    return result


def start_ssh_agent() -> None:
    """Start ssh-agent and export its socket and pid"""
    output = run_command(['ssh-agent', '-s']).stdout
    for line in output.splitlines():
        # SSH_AUTH_SOCK=/tmp/ssh-XXX/agent.123; export SSH_AUTH_SOCK;
        assignment = line.split(';', 1)[0]
        key, sep, value = assignment.partition('=')
        if sep and key in AGENT_ENV_VARS:
            os.environ[key] = value
    logger.info(f"Started ssh-agent (pid {os.environ.get('SSH_AGENT_PID', 'unknown')})")


def stop_ssh_agent() -> None:
    """Kill the agent named by SSH_AGENT_PID and unset its variables"""
    try:
        run_command(['ssh-agent', '-k'])
        logger.info("Stopped ssh-agent")
    except AuditError as e:
        logger.warning(f"Failed to stop ssh-agent: {e}")
    finally:
        for key in AGENT_ENV_VARS:
            os.environ.pop(key, None)


def setup_ssh_agent(ssh_key_path: str) -> bool:
    """
    Make an ssh key available to git

    Starts ssh-agent when SSH_AUTH_SOCK is not set, adds the key and checks
    that the GitHub host accepts it. Returns True if an agent was started
    here; the caller is then responsible for stopping it.
    """
    if not os.path.exists(ssh_key_path):
        raise AuditError(f"SSH key not found at {ssh_key_path}", error_type=ErrorType.ACQUISITION)

    started = False
    if 'SSH_AUTH_SOCK' not in os.environ:
        start_ssh_agent()
        started = True

    try:
        run_command(['ssh-add', ssh_key_path])
        check_ssh_auth()
    except AuditError:
        if started:
            stop_ssh_agent()
        raise
    return started


def check_ssh_auth() -> None:
    """Require the GitHub host to accept the loaded key, without prompting"""
    # `ssh -T` exits non-zero even on success, GitHub reports in stderr
    try:
        result = subprocess.run(
            ['ssh', '-T', '-o', 'BatchMode=yes', SSH_TEST_HOST],
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
        )
    except OSError as e:
        raise AuditError("Failed to execute ssh", error_type=ErrorType.ACQUISITION, cause=e)

    if 'successfully authenticated' not in (result.stderr or ''):
        raise AuditError("SSH authentication test failed", error_type=ErrorType.ACQUISITION)
    logger.info("SSH authentication succeeded")


class RepoManager:
    """Resolves source trees to local directories, cloning into a temp dir"""

    def __init__(self):
        self._temp_dir: Optional[tempfile.TemporaryDirectory] = None
        self._agent_started = False

    def __enter__(self) -> 'RepoManager':
        return self

    def __exit__(self, exc_type, exc, tb):
        self.cleanup()

    @property
    def temp_path(self) -> Path:
        if self._temp_dir is None:
            self._temp_dir = tempfile.TemporaryDirectory(prefix='i18n-audit-')
        return Path(self._temp_dir.name)

    def setup_ssh_agent(self, ssh_key_path: str) -> None:
        """Load an ssh key; an agent started for it is stopped on cleanup"""
        if setup_ssh_agent(ssh_key_path):
            self._agent_started = True

    def resolve(self, source: SourceSettings) -> Path:
        """Local root of a source tree"""
        if source.path:
            root = Path(source.path).expanduser()
            if not root.is_dir():
                raise AuditError(
                    f"Source directory for '{source.label}' not found: {root}",
                    error_type=ErrorType.FILE_IO,
                )
            if source.reference:
                logger.warning(f"Ignoring reference '{source.reference}' for local source '{source.label}'")
            return root
        return self.clone_repo(source.url, source.label, source.reference)

    def clone_repo(self, repo_url: str, dest_name: str, reference: Optional[str] = None) -> Path:
        dest_path = self.temp_path / dest_name
        logger.info(f"Cloning repository: {repo_url}")
        run_command(['git', 'clone', '--quiet', repo_url, str(dest_path)])
        if reference:
            logger.info(f"Checking out {reference} in {dest_name}")
            run_command(['git', 'checkout', '--quiet', reference], cwd=str(dest_path))
        logger.info(f"Successfully cloned {repo_url}")
        return dest_path

    def cleanup(self):
        if self._agent_started:
            stop_ssh_agent()
            self._agent_started = False
        if self._temp_dir is not None:
            self._temp_dir.cleanup()
            self._temp_dir = None
