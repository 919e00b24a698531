import pytest

from renlabs.runtime.aws.proxy.apigatewayv1 import APIGatewayV1Processor
from renlabs.runtime.aws.proxy.apigatewayv2 import APIGatewayV2Processor
from renlabs.runtime.aws.proxy.elb import ELBProcessor
from renlabs.runtime.aws.proxy.errors import UnsupportedEventType
from renlabs.runtime.aws.proxy.registry import DEFAULT_REGISTRY, Registry

from conftest import (
    APIGATEWAY_V1_EVENT,
    APIGATEWAY_V2_EVENT,
    ELB_MULTI_VALUE_EVENT,
    ELB_SINGLE_VALUE_EVENT)


@pytest.mark.parametrize('event, expected', [
    (APIGATEWAY_V1_EVENT, APIGatewayV1Processor),
    (APIGATEWAY_V2_EVENT, APIGatewayV2Processor),
    (ELB_SINGLE_VALUE_EVENT, ELBProcessor),
    (ELB_MULTI_VALUE_EVENT, ELBProcessor),
])
def test_resolve(event, expected):
    assert isinstance(DEFAULT_REGISTRY.resolve(event), expected)


@pytest.mark.parametrize('event', [
    APIGATEWAY_V1_EVENT,
    APIGATEWAY_V2_EVENT,
    ELB_SINGLE_VALUE_EVENT,
    ELB_MULTI_VALUE_EVENT,
])
def test_exactly_one_processor_accepts_well_formed_events(event):
    assert sum(p.can_process(event) for p in DEFAULT_REGISTRY) == 1


@pytest.mark.parametrize('event', [
    {},
    {'httpMethod': 'GET', 'path': '/'},
    {'requestContext': {}},
    {'requestContext': 'apiId'},
    {'Records': [{'cf': {}}]},
    [],
])
def test_unsupported_event(event):
    with pytest.raises(UnsupportedEventType):
        DEFAULT_REGISTRY.resolve(event)


def test_detection_uses_key_presence():
    assert APIGatewayV1Processor().can_process({'requestContext': {'apiId': None}})
    assert ELBProcessor().can_process({'requestContext': {'elb': None}})
    assert APIGatewayV2Processor().can_process({'version': None})


def test_order_is_the_tie_break():
    # version plus elb: a malformed mix the default order gives to the load balancer
    event = {'version': '2.0', 'requestContext': {'elb': {}, 'apiId': 'id'}}
    assert isinstance(DEFAULT_REGISTRY.resolve(event), ELBProcessor)

    v1 = APIGatewayV1Processor()
    registry = Registry([v1])
    assert registry.resolve(APIGATEWAY_V1_EVENT) is v1
    with pytest.raises(UnsupportedEventType):
        registry.resolve(APIGATEWAY_V2_EVENT)


def test_default_registry_order():
    assert [p.name for p in DEFAULT_REGISTRY] == ['elb', 'apigateway-v2', 'apigateway-v1']
    assert len(DEFAULT_REGISTRY) == 3
