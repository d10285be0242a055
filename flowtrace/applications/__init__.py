"""Problems solved by reduction to traced max flow."""
