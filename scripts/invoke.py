#!/usr/bin/env python3
"""Invoke the greeting Lambda in-process or on LocalStack.

Run from the repository root:

    python -m scripts.invoke --local
    python -m scripts.invoke --function greeting
"""
import argparse
import importlib.util
import json
import os
import pathlib

import boto3

from scripts.event_factory import make_apigw_v2_event, make_lambda_context

DEFAULT_HANDLER_PATH = pathlib.Path(__file__).parents[1] / "lambdas/greeting/handler.py"


def parse(argv=None):
    p = argparse.ArgumentParser(description="Invoca la Lambda greeting con un evento de API Gateway v2.")
    p.add_argument("--function", default="greeting", help="Nombre de la función en LocalStack")
    p.add_argument("--method", default="GET")
    p.add_argument("--path", default="/")
    p.add_argument("--body", default=None, help="Body del request (string)")
    p.add_argument("--local", action="store_true", help="Ejecuta el handler en el proceso actual")
    p.add_argument("--handler-path", default=str(DEFAULT_HANDLER_PATH))
    return p.parse_args(argv)


def load_handler(path):
    # Carga el handler sin instalar el paquete (import dinámico desde ruta)
    spec = importlib.util.spec_from_file_location("handler", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)  # type: ignore
    return module


def lambda_client():
    return boto3.client(
        "lambda",
        endpoint_url=os.environ.get("AWS_ENDPOINT", "http://localhost:4566"),
        region_name=os.environ.get("REGION", "us-east-1"),
        aws_access_key_id="test",
        aws_secret_access_key="test",
    )


def invoke_local(args, module=None):
    module = module or load_handler(args.handler_path)
    event = make_apigw_v2_event(args.method, args.path, body=args.body)
    return module.handler(event, make_lambda_context(function_name=args.function))


def invoke_remote(args, client=None):
    client = client or lambda_client()
    event = make_apigw_v2_event(args.method, args.path, body=args.body)
    resp = client.invoke(
        FunctionName=args.function,
        Payload=json.dumps(event).encode("utf-8"),
        InvocationType="RequestResponse",
    )
    raw = resp["Payload"].read().decode("utf-8")
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError:
        payload = raw
    return {
        "status_code": resp.get("StatusCode"),
        "function_error": resp.get("FunctionError"),
        "payload": payload,
    }


def main(argv=None):
    a = parse(argv)
    if a.local:
        result = invoke_local(a)
        print(result["statusCode"])
        print(result["body"])
        return 0 if result["statusCode"] == 200 else 1

    resp = invoke_remote(a)
    print(resp["status_code"], resp["function_error"])
    payload = resp["payload"]
    print(json.dumps(payload) if isinstance(payload, dict) else payload)
    if resp["function_error"] or not isinstance(payload, dict):
        return 1
    return 0 if payload.get("statusCode") == 200 else 1


if __name__ == "__main__":
    raise SystemExit(main())
