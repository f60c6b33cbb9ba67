import os
import sys
import json
import time
from datetime import datetime

class PipelineLogger:
    """파이프라인 단계별 로깅 및 소요시간 측정 유틸 (콘솔은 stderr, 기록은 JSON)"""

    def __init__(self, log_dir="logs", module_name="default", stream=None):
        self.log_dir = log_dir
        self.module_name = module_name
        self.stream = stream or sys.stderr
        self.timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.log_file = os.path.join(log_dir, f"{module_name}_{self.timestamp}.json")
        self.steps = []
        self.current_step = None
        self.step_start_time = None

    def start_step(self, step_name, step_number=None, metadata=None):
        """단계 시작 기록"""
        self.current_step = {
            "step_number": step_number,
            "step_name": step_name,
            "start_time": datetime.now().isoformat(),
            "status": "running",
            "metadata": metadata or {},
            "metrics": {}
        }
        self.step_start_time = time.time()

    def end_step(self, result_count=None, error=None):
        """단계 종료 기록"""
        if not self.current_step:
            return

        elapsed = time.time() - self.step_start_time
        self.current_step["end_time"] = datetime.now().isoformat()
        self.current_step["elapsed_seconds"] = round(elapsed, 2)
        self.current_step["status"] = "error" if error else "completed"

        if result_count is not None:
            self.current_step["metrics"]["result_count"] = result_count

        if error:
            self.current_step["error_message"] = str(error)
            print(f"[ERROR] {self.current_step['step_name']}: {error}", file=self.stream)
        else:
            count = "N/A" if result_count is None else result_count
            print(
                f"[STEP {self.current_step['step_number']}] {self.current_step['step_name']} "
                f"done ({elapsed:.2f}s, {count})",
                file=self.stream,
            )

        self.steps.append(self.current_step)
        self.current_step = None

    def add_metric(self, key, value):
        """현재 단계에 메트릭 추가"""
        if self.current_step:
            self.current_step["metrics"][key] = value

    def save(self):
        """로그를 파일로 저장"""
        os.makedirs(self.log_dir, exist_ok=True)
        log_data = {
            "module": self.module_name,
            "timestamp": self.timestamp,
            "total_steps": len(self.steps),
            "steps": self.steps
        }

        with open(self.log_file, 'w', encoding='utf-8') as f:
            json.dump(log_data, f, ensure_ascii=False, indent=2)

        print(f">>> 로그 저장: {self.log_file}", file=self.stream)
        return self.log_file
