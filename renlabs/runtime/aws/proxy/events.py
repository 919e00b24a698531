"""
Pydantic models of the Lambda event payloads (and their replies) for each
HTTP trigger this package understands.

References:
 - API Gateway REST API (proxy integration, payload 1.0):
   https://docs.aws.amazon.com/apigateway/latest/developerguide/set-up-lambda-proxy-integrations.html
 - API Gateway HTTP API (payload 2.0):
   https://docs.aws.amazon.com/apigateway/latest/developerguide/http-api-develop-integrations-lambda.html
 - Application Load Balancer target group:
   https://docs.aws.amazon.com/elasticloadbalancing/latest/application/lambda-functions.html

Only the fields this package reads are declared; everything else the
provider sends is kept (extra='allow') so handlers can reach it through
request.event.
"""

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class _Open(BaseModel):
    model_config = ConfigDict(extra='allow')


# Requests

class ProxyRequestContext(_Open):
    apiId: Optional[str] = None
    stage: Optional[str] = None
    path: Optional[str] = None
    domainName: Optional[str] = None


class APIGatewayProxyEvent(_Open):
    """REST API proxy integration event (no 'version' field)."""

    httpMethod: str
    path: str
    resource: Optional[str] = None
    headers: Optional[Dict[str, str]] = None
    multiValueHeaders: Optional[Dict[str, List[str]]] = None
    queryStringParameters: Optional[Dict[str, str]] = None
    multiValueQueryStringParameters: Optional[Dict[str, List[str]]] = None
    pathParameters: Optional[Dict[str, str]] = None
    stageVariables: Optional[Dict[str, str]] = None
    requestContext: ProxyRequestContext
    body: Optional[str] = None
    isBase64Encoded: bool = False


class HTTPDescription(_Open):
    method: str
    path: Optional[str] = None
    protocol: Optional[str] = None
    sourceIp: Optional[str] = None
    userAgent: Optional[str] = None


class HTTPRequestContext(_Open):
    apiId: Optional[str] = None
    domainName: Optional[str] = None
    stage: Optional[str] = None
    http: HTTPDescription


class APIGatewayV2HTTPEvent(_Open):
    """HTTP API event, payload format version 2.0."""

    version: str
    routeKey: Optional[str] = None
    rawPath: str
    rawQueryString: Optional[str] = None
    cookies: Optional[List[str]] = None
    headers: Optional[Dict[str, str]] = None
    queryStringParameters: Optional[Dict[str, str]] = None
    pathParameters: Optional[Dict[str, str]] = None
    stageVariables: Optional[Dict[str, str]] = None
    requestContext: HTTPRequestContext
    body: Optional[str] = None
    isBase64Encoded: bool = False


class ELBContext(_Open):
    targetGroupArn: Optional[str] = None


class ALBRequestContext(_Open):
    elb: ELBContext


class ALBTargetGroupEvent(_Open):
    httpMethod: str
    path: str
    headers: Optional[Dict[str, str]] = None
    multiValueHeaders: Optional[Dict[str, List[str]]] = None
    queryStringParameters: Optional[Dict[str, str]] = None
    multiValueQueryStringParameters: Optional[Dict[str, List[str]]] = None
    requestContext: ALBRequestContext
    body: Optional[str] = None
    isBase64Encoded: bool = False


SourceEvent = Union[APIGatewayProxyEvent, APIGatewayV2HTTPEvent, ALBTargetGroupEvent]


# Replies

class APIGatewayProxyResponse(BaseModel):
    statusCode: int
    headers: Dict[str, str] = Field(default_factory=dict)
    multiValueHeaders: Dict[str, List[str]] = Field(default_factory=dict)
    body: str = ''
    isBase64Encoded: bool = False


class APIGatewayV2HTTPResponse(APIGatewayProxyResponse):
    cookies: List[str] = Field(default_factory=list)


class ALBTargetGroupResponse(APIGatewayProxyResponse):
    statusDescription: str
