"""Value types and enums shared across FlowTrace."""
