from varnish_agent.core.state_machine import RegistryEvent, RegistryState, RegistryStateMachine


def test_state_machine_append_path():
    sm = RegistryStateMachine()
    assert sm.state == RegistryState.EMPTY

    assert sm.transition(RegistryEvent.APPEND) == RegistryState.NON_EMPTY
    assert sm.state == RegistryState.NON_EMPTY

    sm.transition(RegistryEvent.APPEND)
    assert sm.state == RegistryState.NON_EMPTY
