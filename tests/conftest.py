import copy

import pytest

APIGATEWAY_V1_EVENT = {
    "resource": "/{proxy+}",
    "path": "/resource/",
    "httpMethod": "GET",
    "headers": {
        "X-Custom-Header1": "v1",
        "X-Custom-Header2": "v3",
    },
    "multiValueHeaders": {
        "X-Custom-Header1": ["v1"],
        "X-Custom-Header2": ["v2", "v3"],
    },
    "queryStringParameters": {
        "q1": "v1",
        "q2": "v3",
    },
    "multiValueQueryStringParameters": {
        "q1": ["v1"],
        "q2": ["v2", "v3"],
    },
    "pathParameters": {"proxy": "resource"},
    "stageVariables": None,
    "requestContext": {
        "resourcePath": "/{proxy+}",
        "httpMethod": "GET",
        "path": "/dev/resource/",
        "stage": "dev",
        "domainName": "abc123.execute-api.us-east-1.amazonaws.com",
        "protocol": "HTTP/1.1",
        "apiId": "apiid",
    },
    "body": "body",
    "isBase64Encoded": False,
}

APIGATEWAY_V2_EVENT = {
    "version": "2.0",
    "routeKey": "$default",
    "rawPath": "/resource/",
    "rawQueryString": "q1=v1&q2=v2&q2=v3",
    "headers": {
        "x-custom-header1": "v1",
        "x-custom-header2": "v2",
    },
    "queryStringParameters": {
        "q1": "v1",
        "q2": "v2,v3",
    },
    "requestContext": {
        "apiId": "apiid",
        "domainName": "abc123.execute-api.us-east-1.amazonaws.com",
        "stage": "$default",
        "http": {
            "method": "GET",
            "path": "/resource",
            "protocol": "HTTP/1.1",
        },
    },
    "body": "body",
    "isBase64Encoded": False,
}

ELB_SINGLE_VALUE_EVENT = {
    "requestContext": {
        "elb": {"targetGroupArn": "arn"},
    },
    "httpMethod": "GET",
    "path": "/resource/",
    "queryStringParameters": {
        "q1": "v1",
        "q2": "v2",
    },
    "headers": {
        "x-custom-header1": "v1",
        "x-custom-header2": "v2",
    },
    "body": "body",
    "isBase64Encoded": False,
}

ELB_MULTI_VALUE_EVENT = {
    "requestContext": {
        "elb": {"targetGroupArn": "arn"},
    },
    "httpMethod": "GET",
    "path": "/resource/",
    "multiValueQueryStringParameters": {
        "q1": ["v1"],
        "q2": ["v2", "v3"],
    },
    "multiValueHeaders": {
        "x-custom-header1": ["v1"],
        "x-custom-header2": ["v2", "v3"],
    },
    "body": "body",
    "isBase64Encoded": False,
}


@pytest.fixture
def v1_event():
    return copy.deepcopy(APIGATEWAY_V1_EVENT)


@pytest.fixture
def v2_event():
    return copy.deepcopy(APIGATEWAY_V2_EVENT)


@pytest.fixture
def elb_event():
    return copy.deepcopy(ELB_SINGLE_VALUE_EVENT)


@pytest.fixture
def elb_multi_event():
    return copy.deepcopy(ELB_MULTI_VALUE_EVENT)


class Recorder:
    """Handler that records what it saw and replies like the examples do."""

    def __init__(self):
        self.calls = []

    def __call__(self, request, writer):
        self.calls.append(request)
        writer.headers.add('X-Custom-Header', 'v1')
        writer.headers.add('X-Custom-Header', 'v2')
        writer.write(b'body')

    @property
    def request(self):
        return self.calls[-1]


@pytest.fixture
def recorder():
    return Recorder()
