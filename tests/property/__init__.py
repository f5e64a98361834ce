"""Property-based tests for proptree value trees and leaf generators."""
