"""
Simple Slack Revoke Session runner for local development.
Builds params and a context from CLI JSON and .env files, then runs the action once.
"""
import argparse
import asyncio
import json
import sys

from slack_revoke import error, invoke
from slack_revoke.config import ActionConfig, load_context_from_env, setup_logging

DEFAULT_PARAMS = {
    "userEmail": "dev-test@example.com",
    "delay": "100ms",
}
DEFAULT_ENVIRONMENT = {
    "ENVIRONMENT": "development",
    "ADDRESS": "https://slack.com",
}


def _parse_json_arg(name: str, value):
    if not value:
        return {}
    try:
        return json.loads(value)
    except json.JSONDecodeError as exc:
        print(f"Failed to parse --{name} as JSON: {exc}")
        sys.exit(1)


def run_dev(params: dict, context: dict) -> bool:
    async def _run():
        try:
            result = await invoke(params, context)
        except Exception as exc:
            print("\n" + "=" * 50)
            print(f"[ERROR] Job failed: {exc} (retryable={getattr(exc, 'retryable', False)})")
            try:
                await error({**params, "error": exc}, context)
            except Exception as handled:
                print(f"[INFO] Error handler re-raised: {handled}")
            return False

        print("\n" + "=" * 50)
        print("[OK] Job completed successfully!")
        print("Result:", json.dumps(result, indent=2))
        return True

    return asyncio.run(_run())


def main():
    parser = argparse.ArgumentParser(description="Run the Slack revoke-session action locally")
    parser.add_argument("--params", help="JSON string of parameters to pass to the action")
    parser.add_argument("--secrets", help="JSON string of secrets to pass to the action")
    parser.add_argument("--environment", help="JSON string of environment values to pass to the action")
    parser.add_argument("--env-file", default=None, help="dotenv file to load (default: envs/.env)")
    parser.add_argument("--log-level", default=None, help="Logging level (default: LOG_LEVEL or INFO)")
    args = parser.parse_args()

    loaded = load_context_from_env(args.env_file)

    params = {**DEFAULT_PARAMS, **_parse_json_arg("params", args.params)}
    environment = {**DEFAULT_ENVIRONMENT, **loaded["environment"], **_parse_json_arg("environment", args.environment)}
    if params.get("address"):
        environment["ADDRESS"] = params["address"]
    secrets = {**loaded["secrets"], **_parse_json_arg("secrets", args.secrets)}
    context = {"environment": environment, "secrets": secrets}

    setup_logging(ActionConfig(context), args.log_level)

    print("Running Slack revoke-session action in development mode...\n")
    print("Parameters:", json.dumps(params, indent=2))
    print("Secrets provided:", ", ".join(sorted(secrets)) or "none")
    print("\n" + "=" * 50 + "\n")

    success = run_dev(params, context)
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
