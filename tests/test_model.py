from ezparse.model import MethodInfo, PropertyInfo


def test_add_parameter_appends_in_order():
	method = MethodInfo(name="greet", type="string")
	first = method.add_parameter(PropertyInfo(name="name", type="string", description=None))
	method.add_parameter(PropertyInfo(name="times", type="int", description=None))
	assert first is method.parameters[0]
	assert [p.name for p in method.parameters] == ["name", "times"]
	assert MethodInfo(name="other").parameters == []
